"""
Persistence layer.

``RestaurantStore`` describes what the services need from storage;
``SQLiteRestaurantRepository`` implements it on top of ``core.db``.
"""
