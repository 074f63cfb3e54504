# repobrowse HTTP API layer
# Created: 2026-10-19
#
# Exposes the browsing core as versioned JSON endpoints under /api/v1/.
