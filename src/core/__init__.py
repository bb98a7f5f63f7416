"""
Core domain models, math primitives, settings and logging.

This module contains the foundational building blocks that are independent
of the register itself (company model, calendar date, invoice median).
"""
