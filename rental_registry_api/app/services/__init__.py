"""
Service layer.

Each service encapsulates the business logic for one record kind and
works against the stores of a ``RentalRegistry`` passed in at
construction, so API handlers never touch SQL directly.
"""
