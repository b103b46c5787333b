"""Core state management: the selectable-list store and its observables."""
