"""
Units that convert the case of their input. The input is treated as conventionally UTF-8 encoded
text: Valid sequences are case mapped, invalid bytes are passed through unchanged.
"""
