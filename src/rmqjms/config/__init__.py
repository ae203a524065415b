"""rmqjms configuration property classes."""
