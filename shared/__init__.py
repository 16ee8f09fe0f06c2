"""
Shared kernel of the travel core

Domain building blocks, the error taxonomy, money and percentage values,
field validation, the unit of work and the message bus used by the
customers, bookings and packages apps.
"""
