"""Domain layer - pure authorization concepts.

Structure:
- enums/: TokenClass, Action
- errors/: Token error values
- value_objects/: Claims, Permission, RequestIdentity (immutable)
- protocols/: Ports implemented by infrastructure adapters

No framework or infrastructure imports live here.
"""
