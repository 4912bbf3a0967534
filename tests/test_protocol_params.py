"""Tests for print parameter encoding."""

import pytest
from pydantic import ValidationError

from dymo_connect.models.params import (
    FlowDirection,
    LabelParameters,
    PrintQuality,
    Rotation,
    TwinTurboRoll,
)
from dymo_connect.protocol.params import encode_print_params


class TestEncodePrintParams:
    """Tests for encode_print_params."""

    def test_defaults_only_copies(self):
        """Default parameters carry Copies=1 and nothing else."""
        xml = encode_print_params(LabelParameters())

        assert xml == "<LabelWriterPrintParams><Copies>1</Copies></LabelWriterPrintParams>"

    def test_none_uses_defaults(self):
        assert encode_print_params(None) == encode_print_params(LabelParameters())

    def test_copies(self):
        xml = encode_print_params(LabelParameters(copies=3))

        assert "<Copies>3</Copies>" in xml

    def test_job_title(self):
        xml = encode_print_params(LabelParameters(job_title="Test Job"))

        assert "<JobTitle>Test Job</JobTitle>" in xml

    def test_booleans(self):
        """Booleans are written as True/False."""
        xml = encode_print_params(LabelParameters(is_twin_turbo=True, is_auto_cut=False))

        assert "<IsTwinTurbo>True</IsTwinTurbo>" in xml
        assert "<IsAutoCut>False</IsAutoCut>" in xml

    def test_unset_fields_omitted(self):
        xml = encode_print_params(LabelParameters(copies=2))

        for tag in ("JobTitle", "FlowDirection", "PrintQuality", "TwinTurboRoll", "Rotation", "IsTwinTurbo"):
            assert tag not in xml

    def test_enums_use_wire_values(self):
        xml = encode_print_params(
            LabelParameters(
                flow_direction=FlowDirection.TOP_TO_BOTTOM,
                print_quality=PrintQuality.BARCODE,
                twin_turbo_roll=TwinTurboRoll.NONE,
                rotation=Rotation.ROTATION_90,
            )
        )

        assert "<FlowDirection>TopToBottom</FlowDirection>" in xml
        assert "<PrintQuality>Barcode</PrintQuality>" in xml
        assert "<TwinTurboRoll>None</TwinTurboRoll>" in xml
        assert "<Rotation>Rotation90</Rotation>" in xml

    def test_tag_order_is_fixed(self):
        """Tags follow the service's order regardless of construction order."""
        params = LabelParameters(
            is_auto_cut=True,
            rotation=Rotation.ROTATION_180,
            job_title="Order",
            copies=4,
            is_twin_turbo=False,
            twin_turbo_roll=TwinTurboRoll.LEFT,
            print_quality=PrintQuality.TEXT,
            flow_direction=FlowDirection.LEFT_TO_RIGHT,
        )

        xml = encode_print_params(params)

        assert xml == (
            "<LabelWriterPrintParams>"
            "<Copies>4</Copies>"
            "<JobTitle>Order</JobTitle>"
            "<FlowDirection>LeftToRight</FlowDirection>"
            "<PrintQuality>Text</PrintQuality>"
            "<TwinTurboRoll>Left</TwinTurboRoll>"
            "<Rotation>Rotation180</Rotation>"
            "<IsTwinTurbo>False</IsTwinTurbo>"
            "<IsAutoCut>True</IsAutoCut>"
            "</LabelWriterPrintParams>"
        )

    def test_job_title_is_escaped(self):
        xml = encode_print_params(LabelParameters(job_title="Fish & <Chips>"))

        assert "<JobTitle>Fish &amp; &lt;Chips&gt;</JobTitle>" in xml

    def test_copies_must_be_positive(self):
        with pytest.raises(ValidationError):
            LabelParameters(copies=0)

    def test_enum_accepts_wire_string(self):
        params = LabelParameters(rotation="Rotation270")

        assert params.rotation is Rotation.ROTATION_270
