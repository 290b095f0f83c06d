"""Core math and rigid body namespace."""
