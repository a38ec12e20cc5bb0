"""Domain layer: password policy, value object, errors and protocols.

No framework or infrastructure dependencies live here.
"""
