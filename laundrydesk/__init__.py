"""
LaundryDesk - Laundry Service Records Management
"""
__version__ = "1.0.0"
