"""
Command Line Interface Package

Command Structure:
- caldate: Main entry point with utility commands (version, config)
- caldate parse / shift / compare: CalendarDate operations
- caldate leap / days-in-month: Gregorian calendar helpers
"""
