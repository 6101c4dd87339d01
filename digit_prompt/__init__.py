"""
Digit Prompt - two-line numeric input dialog for raw terminals
"""
