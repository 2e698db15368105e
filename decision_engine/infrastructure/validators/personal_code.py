"""Estonian personal identification code (isikukood) validator"""

from stdnum.ee import ik


class EstonianPersonalCodeValidator:
    """Format, birth date and checksum validation backed by python-stdnum"""

    def is_valid(self, code: str) -> bool:
        # compact() in stdnum strips whitespace; the engine slices the raw code, so refuse it here
        if not isinstance(code, str) or code != code.strip():
            return False
        return ik.is_valid(code)
