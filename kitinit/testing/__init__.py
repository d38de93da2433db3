"""kitinit testing utilities.

Provides fake collaborators and fixtures for testing code that uses kitinit.
"""

from kitinit.testing.fakes import (
    FakeCall,
    RecordingDirectoryLister,
    RecordingManifestGenerator,
    RecordingRemoteLister,
    StaticPathChecker,
)

__all__ = [
    "FakeCall",
    "StaticPathChecker",
    "RecordingDirectoryLister",
    "RecordingRemoteLister",
    "RecordingManifestGenerator",
]
