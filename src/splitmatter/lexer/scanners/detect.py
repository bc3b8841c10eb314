"""Format detection scanner mixin."""

from splitmatter.config import ScanConfig
from splitmatter.lexer.states import JSON_OPEN, TOML_FENCE, YAML_FENCE, ScanState


class DetectScannerMixin:
    """Mixin choosing the first real state from the first rune.

    Detection looks at nothing but the first character. Anything that is
    not an enabled opener sends the whole input to CONTENT.

    """

    _config: ScanConfig

    def _peek(self) -> str:
        """Inspect the next rune without consuming it. Implemented by Scanner."""
        raise NotImplementedError

    def _detect_format(self) -> ScanState:
        r = self._peek()
        if r == TOML_FENCE.char and self._config.toml_enabled:
            return ScanState.TOML
        if r == YAML_FENCE.char and self._config.yaml_enabled:
            return ScanState.YAML
        if r == JSON_OPEN and self._config.json_enabled:
            return ScanState.JSON
        return ScanState.CONTENT
