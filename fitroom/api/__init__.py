"""fitroom adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level validation and error-to-response mapping.
- Delegates image work to `fitroom.image.service`.
"""
