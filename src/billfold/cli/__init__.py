"""
Command Line Interface Package

Entry point `billfold` with the subcommands client, list-clients, project,
invoice and receipt, plus config and version utilities.
"""
