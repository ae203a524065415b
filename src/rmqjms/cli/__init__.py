"""rmqjms command line interface."""
