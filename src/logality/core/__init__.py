"""
Logality core: configuration, diagnostics logging, exceptions and severities.
"""
