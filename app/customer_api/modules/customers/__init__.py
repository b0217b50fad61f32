"""
Customers module.

Scope:
- One collection endpoint (/hello) over the Customers table
- GET lists, POST creates, PUT patches present fields, DELETE removes by id
- Raw parameterized SQL through the prepared-statement binding (no ORM)
"""
