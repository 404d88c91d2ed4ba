"""
Service layer.

``address_book`` holds the contact store itself; ``contact_service``
maps the uniform resource verbs onto it and decides the outcome of
each request.  API handlers only translate those outcomes into HTTP
responses.
"""
