"""
PlaceNotes
----------
Dated notes attached to geographic places, browsable by time, map or text.
"""

__version__ = "1.0.0"
