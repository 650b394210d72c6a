"""
The CONTROLLER layer drives the model from Qt events: timer ticks and
pointer movement. It holds no widgets.
"""
