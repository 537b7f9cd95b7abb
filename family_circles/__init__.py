"""FamilyCircles: read-only JSON API over a genealogy tree store."""
