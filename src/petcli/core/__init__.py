"""
petcli.core — everything below the terminal.

    config          Pydantic config model, TOML load and save
    constants       Filesystem layout, exit codes, generation ranges
    exceptions      PetCLIError hierarchy
    logging_setup   File logging for the petcli logger tree
    models          Pet record model
    store           JSON-file pet store
"""
