"""Store commands with specialised validation.

Every module in this package is imported by ``build_command_table`` so that
its ``@command`` registrations run.
"""
