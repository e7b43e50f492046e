"""
Core catalog logic: TMDB fetching/validation and database synchronization.
"""
