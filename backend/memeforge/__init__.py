"""MemeForge: brief in, YouTube Shorts production plan out."""
