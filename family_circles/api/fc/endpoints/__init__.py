"""FamilyCircles endpoint modules."""
