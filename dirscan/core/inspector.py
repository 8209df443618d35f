from __future__ import annotations

import logging
import os
import stat

from .classifier import ContentClassifier
from .models import FileObservation
from .protocols import OwnerResolverProtocol

LOGGER = logging.getLogger(__name__)


def extension_of(path: str) -> str:
    name = os.path.basename(path)
    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


class FileInspector:
    def __init__(self, classifier: ContentClassifier, owners: OwnerResolverProtocol) -> None:
        self._classifier = classifier
        self._owners = owners

    def inspect(self, path: str) -> FileObservation | None:
        try:
            info = os.lstat(path)
        except OSError as exc:
            LOGGER.debug("Error reading metadata of %s: %s, skipping", path, exc)
            return None
        if not stat.S_ISREG(info.st_mode):
            return None

        extension = extension_of(path)
        if not extension:
            extension = self._classifier.classify(path)

        return FileObservation(
            path=path,
            size=info.st_size,
            owner=self._owners.resolve(info.st_uid),
            extension=extension,
        )
