"""User interfaces for GedSoundex."""
