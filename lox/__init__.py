"""
A tree-walking evaluator for the expression and statement core of Lox.
"""
