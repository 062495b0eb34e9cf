'''
Tests for learning parameter validation and configuration files.
'''

import pytest

from marginmln.mln.errors import ConfigError
from marginmln.utils.config import LearnConfig, check_params, learn_defaults, learn_config_pattern


class TestCheckParams:

    def test_defaults(self):
        assert check_params({}) == {}
        check_params(dict(learn_defaults))

    @pytest.mark.parametrize('params', [
        {'iterations': -1},
        {'iterations': 2.5},
        {'iterations': True},
        {'C': 0},
        {'C': -1.},
        {'epsilon': -0.1},
        {'epsilon': float('nan')},
        {'loss_scale': 'much'},
        {'loss_function': 'f1'},
    ])
    def test_malformed(self, params):
        with pytest.raises(ConfigError):
            check_params(params)

    def test_zero_iterations(self):
        check_params({'iterations': 0})


class TestLearnConfig:

    def test_dump_and_load(self, tmp_path):
        path = str(tmp_path / (learn_config_pattern % 'smoking'))
        config = LearnConfig()
        config.update({'C': 10., 'network': 'smoking.json', 'l1_regularization': True})
        assert config.dirty
        config.dump(path)
        assert not config.dirty
        loaded = LearnConfig(path)
        assert loaded['C'] == 10.
        assert loaded['network'] == 'smoking.json'
        assert 'l1_regularization' in loaded
        assert loaded['epsilon'] is None
        assert loaded.get('epsilon', 0.1) == 0.1

    def test_dump_without_file(self):
        with pytest.raises(ConfigError):
            LearnConfig().dump()

    def test_malformed_file(self, tmp_path):
        path = tmp_path / 'broken.learn.conf'
        path.write_text("{'C': ")
        with pytest.raises(ConfigError):
            LearnConfig(str(path))

    def test_not_a_dict(self, tmp_path):
        path = tmp_path / 'list.learn.conf'
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            LearnConfig(str(path))
