"""Bill Bot: voice billing for Tamil hotels and shops."""
