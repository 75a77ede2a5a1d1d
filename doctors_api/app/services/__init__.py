"""
Service layer abstraction.

Services own the SQL statements issued against the database so that
API handlers only deal with HTTP concerns.
"""
