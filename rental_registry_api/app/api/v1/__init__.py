"""
Version 1 of the Rental Registry API.
"""
