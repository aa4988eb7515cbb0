"""Runtime services shared by the buffer and the adapters."""
