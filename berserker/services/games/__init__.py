"""Game domain services: rules, seating, the session registry and the gateway.

Pure(ish) domain logic imported by HTTP routes and socket handlers,
keeping transport concerns separated from core game mechanics.
"""
