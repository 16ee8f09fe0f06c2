"""Travel packages app package.

A package groups a customer's bookings under one discount percentage.
Membership is many-to-many and is removed together with either side;
package totals are always recomputed from current prices and membership,
never stored.
"""
