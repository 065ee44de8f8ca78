"""Configuration, logging, errors and the command line shared by the planetstore packages."""
