"""Building blocks shared by the gateway services."""
