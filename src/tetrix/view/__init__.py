"""
The VIEW layer paints the model with Qt (PySide6).
"""
