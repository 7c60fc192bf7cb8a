"""
Tests for the link extractor module.
"""

import types

from feedfinder.parsing.link_extractor import extract_link_attributes


class TestExtractLinkAttributes:
    """Tests for extract_link_attributes."""
    
    def test_returns_generator(self):
        """Test that extraction is lazy."""
        result = extract_link_attributes("<link rel='alternate'>")
        assert isinstance(result, types.GeneratorType)
    
    def test_yields_one_marker_at_a_time(self):
        """Test that the first marker is available without consuming the rest."""
        html = "<link rel='a' href='1'><link rel='b' href='2'>"
        links = extract_link_attributes(html)
        
        assert next(links) == {"rel": "a", "href": "1"}
        assert next(links) == {"rel": "b", "href": "2"}
    
    def test_document_order(self):
        """Test that markers come back in the order they appear."""
        html = """
        <html><head>
          <link rel="stylesheet" href="/style.css">
          <link rel="alternate" type="application/rss+xml" href="/rss.xml" />
          <link rel="icon" href="/favicon.ico"/>
        </head><body></body></html>
        """
        links = list(extract_link_attributes(html))
        
        assert [link["href"] for link in links] == ["/style.css", "/rss.xml", "/favicon.ico"]
        assert links[1] == {"rel": "alternate", "type": "application/rss+xml", "href": "/rss.xml"}
    
    def test_case_insensitive_tags_and_attributes(self):
        """Test that upper-case markup is normalized."""
        html = '<HTML><HEAD><LINK REL="Alternate" TYPE="application/atom+xml" HREF="/atom"></HEAD></HTML>'
        links = list(extract_link_attributes(html))
        
        assert links == [{"rel": "Alternate", "type": "application/atom+xml", "href": "/atom"}]
    
    def test_quote_styles(self):
        """Test double, single and missing quotes."""
        html = """
        <link rel="alternate" href="a.xml">
        <link rel='alternate' href='b.xml'>
        <link rel=alternate href=c.xml>
        """
        links = list(extract_link_attributes(html))
        
        assert [link["href"] for link in links] == ["a.xml", "b.xml", "c.xml"]
        assert all(link["rel"] == "alternate" for link in links)
    
    def test_rel_not_split(self):
        """Test that multi-valued attributes stay raw strings."""
        links = list(extract_link_attributes('<link rel="alternate home" href="/">'))
        
        assert links[0]["rel"] == "alternate home"
    
    def test_marker_without_attributes(self):
        """Test that a bare <link> yields an empty mapping."""
        links = list(extract_link_attributes("<head><link></head>"))
        
        assert links == [{}]
    
    def test_multiline_marker(self):
        """Test that attributes spread across lines are read."""
        html = '<link\n  rel="alternate"\n  type="application/rss+xml"\n  href="/feed"\n/>'
        links = list(extract_link_attributes(html))
        
        assert links == [{"rel": "alternate", "type": "application/rss+xml", "href": "/feed"}]
    
    def test_empty_input(self):
        """Test that empty HTML yields nothing."""
        assert list(extract_link_attributes("")) == []
        assert list(extract_link_attributes("   ")) == []
    
    def test_no_links(self):
        """Test a page without link markers."""
        assert list(extract_link_attributes("<html><body><p>Hello</p></body></html>")) == []
    
    def test_malformed_markup_tolerated(self):
        """Test that broken markup does not raise."""
        html = '<head><link rel="alternate" type="application/rss+xml" href="/ok.xml"><link rel=<<<'
        links = list(extract_link_attributes(html))
        
        assert links[0]["href"] == "/ok.xml"
