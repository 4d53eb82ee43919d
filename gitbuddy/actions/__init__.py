"""User actions: feed, play, smart commit, focus and heatmap."""
