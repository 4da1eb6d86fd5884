from brand_sass.bundles import (
    SassBundleLayers,
    SassLayer,
    annotated,
    check_balanced,
    css_property,
    pop_annotation,
    push_annotation,
    sass_value,
    sass_variable,
)


def test_sass_variable_and_css_property():
    assert sass_variable("brand-blue", "#447099") == "$brand-blue: #447099 !default;"
    assert css_property("brand-blue", "#447099") == "  --brand-blue: #447099;"


def test_sass_value_scalars():
    assert sass_value(True) == "true"
    assert sass_value(False) == "false"
    assert sass_value(None) == "null"
    assert sass_value(600) == "600"
    assert sass_value(1.25) == "1.25"
    assert sass_value(1.0) == "1"
    assert sass_value(2.0) == "2"


def test_annotations_text():
    assert push_annotation("_brand.yml color") == (
        '// quarto-scss-analysis-annotation { "action": "push", "origin": "_brand.yml color" }'
    )
    assert pop_annotation() == '// quarto-scss-analysis-annotation { "action": "pop" }'


def test_annotated_block_is_balanced():
    block = annotated(["$a: 1 !default;"], "test", header="/* header */")
    assert block[0] == "/* header */"
    assert block[1] == push_annotation("test")
    assert block[-1] == pop_annotation()
    assert check_balanced("\n".join(block))


def test_check_balanced_detects_problems():
    assert not check_balanced(push_annotation("x"))
    assert not check_balanced(pop_annotation() + "\n" + push_annotation("x"))
    assert check_balanced("")


def test_layer_dependency_copy():
    layer = SassBundleLayers(key="brand", quarto=SassLayer(defaults="$a: 1 !default;"))
    tagged = layer.with_dependency("bootstrap")
    assert tagged.dependency == "bootstrap"
    assert layer.dependency is None
    assert "dependency" not in layer.to_dict()
    assert tagged.to_dict()["quarto"]["defaults"] == "$a: 1 !default;"
