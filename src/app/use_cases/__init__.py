"""
Use Cases

Organized by flow:
- password_reset/: request, verify and commit steps of the OTP password reset
"""
