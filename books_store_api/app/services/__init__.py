"""
Service layer abstraction.

Services encapsulate the state and business rules of a domain.  The
book store keeps its data in memory; swapping it for a database-backed
implementation does not require changes to the API handlers.
"""
