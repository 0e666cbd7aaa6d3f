"""
Qt application bootstrap.
"""
