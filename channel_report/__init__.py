"""
YouTube Channel Report
Point-in-time snapshot of a public channel's statistics
"""
