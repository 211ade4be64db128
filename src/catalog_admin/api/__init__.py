"""HTTP admin API for categories, genres and cast members."""
