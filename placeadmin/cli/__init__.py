"""placeadmin command line interface."""
