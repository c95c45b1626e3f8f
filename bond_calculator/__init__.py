"""
Bond Net Return Calculator.
"""
