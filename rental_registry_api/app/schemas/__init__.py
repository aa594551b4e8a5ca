"""
Pydantic schema definitions for records and API payloads.

Each record kind (business owners, customers, rental items, leases)
defines a ``*Create`` request model and a record model.  The record
model is what the stores persist and what the API returns; its JSON
field names follow the camelCase record layout through aliases.
"""
