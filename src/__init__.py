"""
vBank Credit - Credit Quote Service

A FastAPI-based microservice that quotes lending rates for a simulated
bank, validating requests against bounds held by a remote config backend
and tracking which client groups used the bank.
"""

__version__ = "0.1.0"
