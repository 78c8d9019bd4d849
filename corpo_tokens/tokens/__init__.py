"""Store de tokens y presets de tema."""
