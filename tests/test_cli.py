"""
Tests for CLI commands.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from docusign_wrapper.cli import cli
from docusign_wrapper.config import DocuSignConfig
from docusign_wrapper.exceptions import AccountNotAccessibleError


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_config():
    """Create mock configuration."""
    with patch('docusign_wrapper.cli.get_config_manager') as mock:
        config_manager = MagicMock()
        config_manager.get.return_value = DocuSignConfig(
            username="user@example.com",
            password="secret",
            integrator_key="key",
            account_id="1234567",
        )
        mock.return_value = config_manager
        yield config_manager


@pytest.fixture
def mock_client():
    """Patch get_client with a context-managed mock."""
    with patch('docusign_wrapper.cli.get_client') as mock:
        mock_instance = MagicMock()
        mock_instance.__enter__ = MagicMock(return_value=mock_instance)
        mock_instance.__exit__ = MagicMock(return_value=False)
        mock.return_value = mock_instance
        yield mock_instance


class TestCLI:
    """Tests for main CLI."""
    
    def test_version(self, runner):
        """Test version option."""
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert 'docusign' in result.output.lower()
    
    def test_help(self, runner):
        """Test help output."""
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'DocuSign Wrapper' in result.output


class TestConfigureCommand:
    """Tests for configure command."""
    
    def test_configure_show(self, runner, mock_config):
        """Test showing current configuration."""
        result = runner.invoke(cli, ['configure', '--show'])
        assert result.exit_code == 0
        assert 'Configuration' in result.output
        assert '1234567' in result.output
        assert 'secret' not in result.output
    
    def test_configure_with_options(self, runner, mock_config):
        """Test configuration with options."""
        result = runner.invoke(cli, [
            'configure',
            '--host', 'https://www.docusign.net/restapi/v2',
            '--account-id', '42'
        ])
        assert result.exit_code == 0
        mock_config.update.assert_called_once_with(
            host='https://www.docusign.net/restapi/v2',
            account_id='42'
        )


class TestNotConfigured:
    """Tests for commands without configuration."""
    
    def test_folders_not_configured(self, runner):
        """Test data commands refuse to run without credentials."""
        with patch('docusign_wrapper.cli.get_config_manager') as mock:
            config_manager = MagicMock()
            config_manager.get.return_value = DocuSignConfig()
            mock.return_value = config_manager
            
            result = runner.invoke(cli, ['folders'])
        
        assert result.exit_code == 1
        assert 'not configured' in result.output.lower()


class TestEnvelopeCommands:
    """Tests for envelope, recipient and tab commands."""
    
    def test_envelopes(self, runner, mock_config, mock_client):
        """Test listing envelopes with the default date."""
        mock_client.get_envelopes.return_value = {'env-1': {}, 'env-2': {}}
        
        result = runner.invoke(cli, ['envelopes'])
        
        assert result.exit_code == 0
        assert 'env-1' in result.output
        mock_client.get_envelopes.assert_called_once_with()
    
    def test_envelopes_from_date(self, runner, mock_config, mock_client):
        """Test the from-date option."""
        mock_client.get_envelopes.return_value = {}
        
        result = runner.invoke(cli, ['envelopes', '--from-date', '2024-03-01'])
        
        assert result.exit_code == 0
        called_date = mock_client.get_envelopes.call_args.args[0]
        assert called_date.isoformat() == '2024-03-01'
    
    def test_recipients_json(self, runner, mock_config, mock_client):
        """Test recipients as JSON."""
        mock_client.get_recipients_for_envelope.return_value = {'1': {}, '2': {}}
        
        result = runner.invoke(cli, ['recipients', 'env-1', '--format', 'json'])
        
        assert result.exit_code == 0
        assert json.loads(result.output) == ['1', '2']
    
    def test_tabs_table(self, runner, mock_config, mock_client):
        """Test tabs table shows unsigned fields."""
        mock_client.get_tabs_for_recipient_for_envelope.return_value = {
            'signHereTabs': {'t1': {'SignHere': False}},
            'textTabs': {'t2': {'Company': 'Acme'}},
        }
        
        result = runner.invoke(cli, ['tabs', 'env-1', '1'])
        
        assert result.exit_code == 0
        assert 'not signed' in result.output
        assert 'Acme' in result.output
        mock_client.get_tabs_for_recipient_for_envelope.assert_called_once_with('env-1', '1')
    
    def test_tabs_json(self, runner, mock_config, mock_client):
        """Test tabs JSON keeps the False marker."""
        tabs = {'signHereTabs': {'t1': {'SignHere': False}}}
        mock_client.get_tabs_for_recipient_for_envelope.return_value = tabs
        
        result = runner.invoke(cli, ['tabs', 'env-1', '1', '-f', 'json'])
        
        assert result.exit_code == 0
        assert json.loads(result.output) == tabs


class TestFolderCommands:
    """Tests for folder commands."""
    
    def test_folders(self, runner, mock_config, mock_client):
        """Test listing folders."""
        mock_client.get_folders.return_value = {'A': 'Inbox', 'B': 'Contracts'}
        
        result = runner.invoke(cli, ['folders'])
        
        assert result.exit_code == 0
        assert 'Inbox' in result.output
        assert 'Contracts' in result.output
    
    def test_folder_contents_with_status(self, runner, mock_config, mock_client):
        """Test the status flag is passed through."""
        mock_client.get_folder_contents.return_value = {'env-1': 'Contract (sent)'}
        
        result = runner.invoke(cli, ['folder-contents', 'A', '--status', '-f', 'csv'])
        
        assert result.exit_code == 0
        assert 'env-1,Contract (sent)' in result.output
        mock_client.get_folder_contents.assert_called_once_with('A', include_status=True)


class TestUserCommands:
    """Tests for user commands."""
    
    def test_users_active(self, runner, mock_config, mock_client):
        """Test the active filter."""
        mock_client.get_users.return_value = {'u1': 'Jane Doe'}
        
        result = runner.invoke(cli, ['users', '--active'])
        
        assert result.exit_code == 0
        assert 'Jane Doe' in result.output
        mock_client.get_users.assert_called_once_with(active_only=True)
    
    def test_groups(self, runner, mock_config, mock_client):
        """Test listing a user's groups."""
        mock_client.get_user_groups.return_value = {'1': 'Administrators'}
        
        result = runner.invoke(cli, ['groups', 'u1'])
        
        assert result.exit_code == 0
        assert 'Administrators' in result.output


class TestErrors:
    """Tests for error reporting."""
    
    def test_account_not_accessible(self, runner, mock_config):
        """Test a login failure exits with an error."""
        with patch('docusign_wrapper.cli.get_client') as mock:
            mock.side_effect = AccountNotAccessibleError('1234567')
            
            result = runner.invoke(cli, ['users'])
        
        assert result.exit_code == 1
        assert 'Unable to access specified Account ID: 1234567' in result.output
