"""Core building blocks: transport, mediator, session stores, resources."""
