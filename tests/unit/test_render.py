"""Unit tests for the render entry points"""

from twimg.common.config import ScalingOptions
from twimg.common.errors import ErrorKind
from twimg.common.types import RenderInput, ViewportFraction
from twimg.responsive.render import flag_parse, output_render, rawAttributes_render, renderInput_build


class TestOutputRender:
    """Test rendering from typed inputs"""

    def test_no_overrides(self, options, provider):
        """Test defaults across 1x and 2x"""
        output = output_render(options, RenderInput(base_url="/a.jpg"), provider)
        assert output.sizes == "100vw"
        assert output.srcset == ",".join(
            f"/a.jpg?width={w} {w}w" for w in [640, 768, 1024, 1280, 1536, 2048]
        )

    def test_fraction_override(self, options, provider):
        """Test size-md=0.5 shrinks md candidates and adds a sizes entry"""
        render_input = RenderInput(base_url="/a.jpg", overrides={"md": ViewportFraction(0.5)})
        output = output_render(options, render_input, provider)
        assert output.sizes == "(min-width: 768px) 50vw, 100vw"
        assert output.srcset == ",".join(
            f"/a.jpg?width={w} {w}w" for w in [640, 384, 1024, 1280, 768, 2048]
        )

    def test_empty_ratios(self, provider):
        """Test without ratios the candidates are the distinct thresholds"""
        options = ScalingOptions.from_pairs([("sm", 640), ("md", 768)])
        output = output_render(options, RenderInput(base_url="/a.jpg"), provider)
        assert output.sizes == "100vw"
        assert output.srcset == "/a.jpg?width=640 640w,/a.jpg?width=768 768w"


class TestRawAttributesRender:
    """Test rendering straight from element attributes"""

    def test_end_to_end(self, options, provider):
        """Test src, overrides and fallback size are recovered"""
        attributes = [
            ("alt", "A cat"),
            ("src", "/cat.jpg?v=3"),
            ("size-sm", "300"),
            ("fallback-size", "80vw"),
        ]
        result = rawAttributes_render(options, attributes, provider)
        assert result.isOk()
        assert result.value.sizes == "(min-width: 640px) 300px, 80vw"
        assert result.value.srcset.startswith("/cat.jpg?v=3&width=300 300w,")

    def test_unknown_breakpoint_inert(self, options, provider):
        """Test size-xx has no effect on either attribute"""
        plain = rawAttributes_render(options, [("src", "/a.jpg")], provider)
        with_unknown = rawAttributes_render(options, [("src", "/a.jpg"), ("size-xx", "0.3")], provider)
        assert with_unknown.value == plain.value

    def test_out_of_range_has_no_output(self, options, provider):
        """Test a validation failure returns only the error"""
        result = rawAttributes_render(options, [("src", "/a.jpg"), ("size-lg", "1.5")], provider)
        assert not result.isOk()
        assert result.value is None
        assert result.error.kind is ErrorKind.OUT_OF_RANGE_VALUE

    def test_deterministic(self, options, provider):
        """Test repeated renders are identical"""
        attributes = [("src", "/a.jpg"), ("size-lg", "0.25"), ("size-sm", "0.5")]
        first = rawAttributes_render(options, attributes, provider).value
        for _ in range(5):
            assert rawAttributes_render(options, attributes, provider).value == first


class TestRenderInputBuild:
    """Test recovery of RenderInput from attributes"""

    def test_defaults(self):
        """Test missing attributes fall back to defaults"""
        render_input = renderInput_build([]).value
        assert render_input.base_url == ""
        assert render_input.fallback_size == "100vw"
        assert render_input.conserve_src is False

    def test_sizes_attribute_is_not_an_override(self):
        """Test `sizes` does not match the `size-` prefix"""
        render_input = renderInput_build([("sizes", "50vw")]).value
        assert dict(render_input.overrides) == {}

    def test_conserve_src(self):
        """Test conserve-src flag is recovered"""
        assert renderInput_build([("conserve-src", "true")]).value.conserve_src is True
        assert renderInput_build([("conserve-src", "False")]).value.conserve_src is False

    def test_flag_parse(self):
        """Test boolean attribute presence semantics"""
        assert flag_parse(None) is True
        assert flag_parse("") is True
        assert flag_parse("conserve-src") is True
        assert flag_parse("false") is False
