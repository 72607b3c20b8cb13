# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for layout primitives."""

import pytest

from genro_htmltree import HtmlBuilder, render
from genro_htmltree import layout
from genro_htmltree.layout import Measure, ModularSpacing, Ratio, load_stylesheet

h = HtmlBuilder()


class TestValues:
    """Tests for spacing, measure and ratio values."""

    def test_modular_spacing_levels(self):
        """Test the modular scale."""
        assert str(ModularSpacing(0)) == '0'
        assert str(ModularSpacing(1)) == '0.4875rem'
        assert str(ModularSpacing(3)) == '1.097rem'
        assert str(ModularSpacing(4)) == '1.645rem'

    def test_modular_spacing_verbatim(self):
        """Test that strings pass through and values re-wrap."""
        assert str(ModularSpacing('2px')) == '2px'
        assert str(ModularSpacing(ModularSpacing(1))) == '0.4875rem'

    def test_modular_spacing_invalid(self):
        """Test rejected spacing values."""
        with pytest.raises(ValueError, match=">= 0"):
            ModularSpacing(-1)
        with pytest.raises(TypeError):
            ModularSpacing(True)
        with pytest.raises(TypeError):
            ModularSpacing(1.5)

    def test_measure(self):
        """Test character and verbatim widths."""
        assert str(Measure(60)) == '60ch'
        assert str(Measure('40rem')) == '40rem'
        with pytest.raises(TypeError):
            Measure(None)

    def test_ratio(self):
        """Test ratio parsing and validation."""
        assert str(Ratio((16, 9))) == '16/9'
        assert str(Ratio('4/3')) == '4/3'
        with pytest.raises(ValueError, match="positive"):
            Ratio((0, 1))


class TestStylesheets:
    """Tests for bundled stylesheet loading."""

    def test_load_stylesheet(self):
        """Test that bundled stylesheets load and are cached."""
        css = load_stylesheet('stack')
        assert '.t-stack' in css
        assert '--t-stack-space' in css
        assert load_stylesheet('stack') is css

    def test_every_layout_has_stylesheet(self):
        """Test that each primitive's stylesheet ships with the package."""
        for name in ('stack', 'cluster', 'padded', 'center', 'cover',
                     'switcher', 'fluid-grid', 'frame', 'reset'):
            assert load_stylesheet(name)

    def test_missing_stylesheet(self):
        """Test that unknown names raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_stylesheet('nope')


class TestLayouts:
    """Tests for the layout primitives."""

    def test_stack(self):
        """Test stack markup, spacing variable and stylesheet."""
        html = render(layout.stack(1, [h.p('one'), h.p('two')]))
        assert html == (
            f'<style>{load_stylesheet("stack")}</style>'
            '<div class="t-stack" style="--t-stack-space: 0.4875rem;">'
            '<p>one</p><p>two</p></div>'
        )

    def test_stack_extra_attributes(self):
        """Test that extra classes merge with the layout class."""
        stack = layout.stack(0, [], class_='mine', id='s')
        assert stack.attributes.items() == [('class', 't-stack mine'), ('id', 's')]
        assert stack.variables == {'t-stack-space': '0'}

    def test_stylesheet_shipped_once(self):
        """Test that many instances ship the layout rules once."""
        html = render(h.html(h.head(), h.body(
            h.stack(1, h.p('a')),
            h.stack(2, h.p('b')),
            h.cluster(1, h.span('c')),
        )))
        assert html.count(load_stylesheet('stack')) == 1
        assert html.count(load_stylesheet('cluster')) == 1
        assert html.count('<style>') == 1

    def test_cluster(self):
        """Test cluster class and gap variable."""
        cluster = layout.cluster('1rem', [h.span('a')])
        assert cluster.attributes['class'] == 't-cluster'
        assert cluster.variables == {'t-cluster-gap': '1rem'}

    def test_padded(self):
        """Test padded box variable."""
        assert layout.padded(1, []).variables == {'t-padded-padding': '0.4875rem'}

    def test_center(self):
        """Test center with and without a max width."""
        assert layout.center([h.p('x')]).variables == {}
        assert layout.center([], max_width=40).variables == {'t-center-max-width': '40ch'}

    def test_cover(self):
        """Test cover wraps its parts in marked divs."""
        cover = layout.cover(h.h1('Hi'), header=h.nav('n'), footer=h.p('f'), height=80)
        assert [child.attributes['class'] for child in cover] == [
            't-cover-header', 't-cover-main', 't-cover-footer',
        ]
        assert cover.variables == {'t-cover-height': '80vh'}

    def test_cover_main_only(self):
        """Test cover without header and footer."""
        cover = layout.cover('content')
        assert len(cover) == 1
        assert render(cover).endswith(
            '<div class="t-cover" style="--t-cover-height: 100vh;">'
            '<div class="t-cover-main">content</div></div>'
        )

    def test_switcher(self):
        """Test switcher variables in order."""
        switcher = layout.switcher(1, 30, [h.div('a'), h.div('b')])
        assert list(switcher.variables.items()) == [
            ('t-switcher-gap', '0.4875rem'),
            ('t-switcher-threshold', '30ch'),
        ]

    def test_fluid_grid(self):
        """Test fluid grid class and variables."""
        grid = layout.fluid_grid(20, 1, [h.div('a')])
        assert grid.attributes['class'] == 't-fluid-grid'
        assert grid.variables == {
            't-fluid-grid-min-width': '20ch',
            't-fluid-grid-gap': '0.4875rem',
        }

    def test_frame(self):
        """Test frame ratio variable."""
        frame = layout.frame((16, 9), [h.img(src='a.jpg', alt='')])
        assert frame.variables == {'t-frame-ratio': '16/9'}

    def test_css_reset(self):
        """Test the reset carrier element."""
        html = render(h.html(h.head(), h.body(h.css_reset())))
        assert '<body><span hidden></span></body>' in html
        assert load_stylesheet('reset') in html

    def test_builder_components_match_functions(self):
        """Test that builder components render like the plain functions."""
        assert render(h.switcher(1, 30, h.p('a'))) == render(layout.switcher(1, 30, [h.p('a')]))
        assert render(h.center(h.p('a'), max_width=50)) == render(layout.center([h.p('a')], max_width=50))


class TestNestedLayouts:
    """Tests for layouts placed inside layouts of the same kind."""

    def test_stack_children_never_read_the_gap(self):
        """Test that the stack gap lives on the container, not on its children."""
        css = load_stylesheet('stack')
        for rule in css.split('}'):
            selector, _, body = rule.partition('{')
            if '>' in selector:
                assert '--t-stack-space' not in body
        assert 'gap: var(--t-stack-space' in css

    def test_nested_stack_keeps_both_gaps(self):
        """Test that a nested stack carries its own gap beside the outer one."""
        inner = layout.stack(0, [h.p('b'), h.p('c')])
        outer = layout.stack(3, [h.p('a'), inner])
        html = render(outer)
        assert html.count(load_stylesheet('stack')) == 1
        assert html.endswith(
            '<div class="t-stack" style="--t-stack-space: 1.097rem;"><p>a</p>'
            '<div class="t-stack" style="--t-stack-space: 0;"><p>b</p><p>c</p></div></div>'
        )
