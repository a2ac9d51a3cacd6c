"""MboaSMS Source Package.

Cameroonian SMS marketing core: phone classification and SMS delivery.

Layers:
    - core: Phone classification, configuration, logging, exceptions
    - engine: Business rules (sender names, contact validation, messaging)
    - integrations: External services (MBOA SMS gateway)
"""

__version__ = "0.1.0"
