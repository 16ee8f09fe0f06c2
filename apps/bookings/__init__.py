"""Bookings app package.

Flight and hotel bookings stored as one booking row plus one extension
row, their status lifecycle, and the commands that create, transition
and delete them.
"""
