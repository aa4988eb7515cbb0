"""Host adapters embedding ``MutableText`` in user interfaces."""
