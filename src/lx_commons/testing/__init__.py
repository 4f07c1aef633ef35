"""Testing – fakes and property-based strategies for code built on lx-commons."""
