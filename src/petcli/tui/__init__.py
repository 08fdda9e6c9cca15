"""
petcli.tui — the full-screen pet dashboard.

    events     Ticker + key-press multiplexer feeding one queue
    terminal   Raw (cbreak) mode and the stdin key reader
    state      AppState and the apply() transition function
    render     Pure Rich layout for a state and a pet snapshot
    app        run_dashboard(): the single-threaded main loop

Only ``app`` and ``terminal`` need a real terminal; the rest is testable
without one.
"""
