"""Domain layer (value objects, enums and API models).

Domain modules do no I/O. They only decode and encode the mappings that the
HTTP layer hands them.
"""
