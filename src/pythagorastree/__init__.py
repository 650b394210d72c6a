"""
Animated, pointer-driven Pythagoras tree.

Run with: python -m pythagorastree
"""
