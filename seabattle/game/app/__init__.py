"""Turn state machine and collaborator ports."""
