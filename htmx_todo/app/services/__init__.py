"""
Service layer abstraction.

Services encapsulate the state and business rules of the application.
Endpoints receive a service instance through a FastAPI dependency
instead of importing module level state.
"""
