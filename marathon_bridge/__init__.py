"""Marathon-to-Consul bridge: Marathon API client and registration-intent derivation."""
