"""credguard: policy-validated, bcrypt-hashed password credentials."""

__version__ = "0.1.0"
