"""
Application layer

Use cases, DTOs and the store that ties the domain together.
"""
