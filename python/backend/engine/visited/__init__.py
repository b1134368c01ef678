from backend.engine.visited.trie import LayoutTrie, TrieNode, canonical_key

__all__ = ["LayoutTrie", "TrieNode", "canonical_key"]
