"""
rainviewer test suite

Structure:
- unit/: offline tests; HTTP is replaced with Mock sessions
- integration/: live calls against api.rainviewer.com (opt-in, RAINVIEWER_LIVE_TESTS=1)
"""
