"""HTTP routers for the study assistant: chat turns and health checks."""
