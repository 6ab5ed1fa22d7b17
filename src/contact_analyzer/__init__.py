"""
Contact Analyzer - contact list cleanup service

Imports contact spreadsheets, checks every record against the
business rules (client key, name, email, Chiapas phone area codes)
and exports the corrected list back to a spreadsheet.
"""

__version__ = "0.1.0"
