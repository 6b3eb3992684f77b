"""Game packages: core rules, opponent AI, turn control, console UI and infra."""
