"""Ports — contracts the domain expects infrastructure to fulfil."""
