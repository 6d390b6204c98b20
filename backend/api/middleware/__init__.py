"""Request gates shared by the feature routers."""
