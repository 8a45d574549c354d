"""usysconf command-line interface."""
