"""
Tests for tab value handling.
"""

from docusign_wrapper.api.envelopes import tab_value


class TestTabValue:
    """Tests for tab_value."""
    
    def test_sign_here(self):
        assert tab_value("signHereTabs", {"status": "signed"}) == "signed"
        assert tab_value("signHereTabs", {"status": None}) is False
    
    def test_sign_here_ignores_value(self):
        """Test sign-here tabs never report a value."""
        assert tab_value("signHereTabs", {"value": "x"}) is False
    
    def test_other_categories_ignore_status(self):
        assert tab_value("textTabs", {"status": "active"}) == ""
    
    def test_zero_is_a_value(self):
        """Test "0" counts as a non-empty status or value."""
        assert tab_value("signHereTabs", {"status": "0"}) == "0"
        assert tab_value("textTabs", {"value": "0"}) == "0"
    
    def test_null_value(self):
        assert tab_value("textTabs", {"value": None}) == ""
