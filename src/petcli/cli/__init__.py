"""
petcli.cli — Click-based CLI entry point and command handlers.

Commands:
    dashboard   Run the interactive pet dashboard
    list        Print the stored pets
    add         Append randomly generated pets
    delete      Delete a pet by index
    init        Create an empty pet store
    config      Show or initialise the configuration file
    version     Show version information
"""
