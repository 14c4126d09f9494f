"""Application layer coordinating features for user interfaces."""
