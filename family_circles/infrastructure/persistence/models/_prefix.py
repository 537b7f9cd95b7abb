"""Table name prefix used by the genealogy database."""

TABLE_PREFIX = "wt_"
