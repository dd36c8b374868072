"""
Adapter: Quantity-change instruction JSON codec.

Serializes instructions in the CDM JSON shape (meta-wrapped currency,
decimals as numbers) and reads them back through the same wire models.
"""

from pydantic import ValidationError

from app.domain.trade.entities import QuantityChangeInstruction
from app.domain.trade.errors import ParseError
from app.infrastructure.trade.cdm_json_parser import describe_validation_error
from app.infrastructure.trade.cdm_schemas import QuantityChangeInstructionModel


class InstructionCodec:
    """Converts QuantityChangeInstruction to and from CDM JSON."""

    def to_model(self, instruction: QuantityChangeInstruction) -> QuantityChangeInstructionModel:
        return QuantityChangeInstructionModel.from_domain(instruction)

    def dumps(self, instruction: QuantityChangeInstruction) -> str:
        """Serialize an instruction to CDM JSON text."""
        return self.to_model(instruction).model_dump_json(by_alias=True)

    def loads(self, raw: str) -> QuantityChangeInstruction:
        """Parse CDM JSON text into an instruction.

        Raises:
            ParseError: If the text is not a valid quantity-change instruction.
        """
        try:
            model = QuantityChangeInstructionModel.model_validate_json(raw)
        except ValidationError as exc:
            reason, location = describe_validation_error(exc)
            raise ParseError(reason, location=location) from exc
        return model.to_domain()
