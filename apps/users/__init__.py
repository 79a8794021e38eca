"""Users app package.

Users own units and make bookings. Callers identify themselves by user id;
there is no authentication layer, so this model is independent from
Django's auth user.
"""
