"""
The VIEW layer: Qt widgets and graphics items. It only reads the model.
"""
