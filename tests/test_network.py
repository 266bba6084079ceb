"""Tests for NeuralNetwork training and inference."""

import numpy as np
import pytest

from neural_genetics import (
    BrainConfig,
    DataItem,
    DataPiece,
    Dataset,
    Dense,
    NeuralNetwork,
    build_network,
)


def learnable_dataset():
    """Each output is a copy or a negation of one input bit."""
    items = []
    for a in (0.0, 1.0):
        for b in (0.0, 1.0):
            items.append(
                DataItem(DataPiece.vector([a, b]), DataPiece.vector([a, b, 1 - a, 1 - b]))
            )
    return Dataset(items)


def make_network(seed, epochs, batch_size=2, learning_rate=0.5):
    rng = np.random.default_rng(seed)
    layers = [Dense(2, 4, rng=rng), Dense(4, 4, rng=rng)]
    return NeuralNetwork(layers, learning_rate, epochs, batch_size, rng=rng)


class TestNetworkBasics:
    def test_predict_shape(self):
        net = build_network(BrainConfig(), np.random.default_rng(0))
        out = net.predict(DataPiece.vector([1.0, 2.0]))
        assert out.shape == (4,)
        assert np.all((out > 0) & (out < 1))

    def test_predict_returns_independent_copy(self):
        net = make_network(0, epochs=1)
        first = net.predict(DataPiece.vector([0.0, 1.0]))
        snapshot = first.copy()
        net.predict(DataPiece.vector([5.0, -5.0]))
        np.testing.assert_array_equal(first, snapshot)

    def test_predict_has_no_learning_side_effects(self):
        net = make_network(0, epochs=1)
        weights = [layer.weights.copy() for layer in net.layers]
        biases = [layer.biases.copy() for layer in net.layers]
        net.predict(DataPiece.vector([0.3, 0.4]))
        for layer, w, b in zip(net.layers, weights, biases):
            np.testing.assert_array_equal(layer.weights, w)
            np.testing.assert_array_equal(layer.biases, b)

    def test_summary_lists_layers(self):
        net = build_network(BrainConfig(), np.random.default_rng(0))
        assert net.summary().splitlines() == ["Dense layer: 4 neurons"] * 3

    def test_print_summary(self, capsys):
        net = make_network(0, epochs=1)
        net.print_summary()
        assert "Dense layer: 4 neurons" in capsys.readouterr().out


class TestNetworkTraining:
    def test_empty_dataset_is_noop(self):
        net = make_network(0, epochs=5)
        weights = [layer.weights.copy() for layer in net.layers]
        assert net.train(Dataset()) == 0.0
        for layer, w in zip(net.layers, weights):
            np.testing.assert_array_equal(layer.weights, w)

    def test_returns_positive_final_epoch_error(self):
        net = make_network(0, epochs=3)
        error = net.train(learnable_dataset())
        assert error > 0.0

    def test_error_is_half_squared_error(self):
        """With one epoch and one item per batch, the first item's error
        is computed before any update touches it."""
        net = make_network(0, epochs=1, batch_size=1)
        item = DataItem(DataPiece.vector([0.2, 0.8]), DataPiece.vector([1, 0, 1, 0]))
        expected = np.sum((item.output.body - net.predict(item.input)) ** 2) / 2
        assert net.train(Dataset([item])) == pytest.approx(expected)

    def test_longer_training_lowers_error(self):
        """Statistical: averaged over seeds, more epochs -> lower error."""
        data = learnable_dataset()
        short = [make_network(seed, epochs=2).train(data) for seed in range(5)]
        long = [make_network(seed, epochs=300).train(data) for seed in range(5)]
        assert np.mean(long) < np.mean(short)

    def test_training_moves_prediction_toward_target(self):
        net = make_network(3, epochs=1000, batch_size=1)
        data = learnable_dataset()
        net.train(data)
        for item in data:
            pred = net.predict(item.input)
            np.testing.assert_array_equal(np.round(pred), item.output.body)

    def test_partial_final_batch_is_committed(self):
        net = make_network(0, epochs=1, batch_size=3)
        weights = [layer.weights.copy() for layer in net.layers]
        net.train(learnable_dataset())  # batches of 3 and 1
        for layer, w in zip(net.layers, weights):
            assert not np.array_equal(layer.weights, w)
            assert np.all(layer.weights_delta == 0.0)

    def test_weights_commit_once_per_batch(self, monkeypatch):
        commits = []
        original = Dense.update_weights

        def counting(layer):
            commits.append(layer)
            original(layer)

        monkeypatch.setattr(Dense, "update_weights", counting)
        net = make_network(0, epochs=2, batch_size=3)
        net.train(learnable_dataset())  # 4 items -> batches of 3 and 1
        assert len(commits) == 2 * 2 * len(net.layers)

    def test_batch_matches_eager_bias_deferred_weight_sequence(self):
        data = learnable_dataset()
        net = make_network(4, epochs=1, batch_size=len(data))
        reference = make_network(4, epochs=1, batch_size=len(data))

        # Same seed: the reference draws the permutation train() will use.
        order = reference.rng.permutation(len(data))
        initial_weights = [layer.weights.copy() for layer in reference.layers]
        for index in order:
            item = data[index]
            signal = item.input
            for layer in reference.layers:
                signal = layer.forward(signal)
            signal, downstream = item.output, None
            for layer in reversed(reference.layers):
                signal = layer.backward(signal, downstream)
                downstream = layer
            signal = item.input
            for layer in reference.layers:
                signal = layer.delta_weights(signal, reference.learning_rate)
            # Biases move per example; weights wait for the batch commit.
            for layer, w in zip(reference.layers, initial_weights):
                np.testing.assert_array_equal(layer.weights, w)
                assert np.any(layer.biases != 0.0)
        for layer in reference.layers:
            layer.update_weights()

        net.train(data)
        for trained, expected in zip(net.layers, reference.layers):
            np.testing.assert_allclose(trained.weights, expected.weights)
            np.testing.assert_allclose(trained.biases, expected.biases)

    def test_reshuffles_every_epoch(self, monkeypatch):
        orders = []
        original = Dataset.shuffled

        def recording(dataset, rng):
            shuffled = original(dataset, rng)
            orders.append([item.input.body.tolist() for item in shuffled])
            return shuffled

        monkeypatch.setattr(Dataset, "shuffled", recording)
        net = make_network(0, epochs=5)
        net.train(learnable_dataset())
        assert len(orders) == 5
        assert any(order != orders[0] for order in orders[1:])

    def test_seeded_training_is_deterministic(self):
        data = learnable_dataset()
        a = make_network(7, epochs=10)
        b = make_network(7, epochs=10)
        assert a.train(data) == b.train(data)
        for la, lb in zip(a.layers, b.layers):
            np.testing.assert_array_equal(la.weights, lb.weights)
