'''
Word counters over singly linked lists, instrumented for benchmarking.

Every counter tallies the word comparisons it makes and the node references
it assigns, so the list disciplines can be compared on the same text.
'''

from abc import ABC, abstractmethod


class Word:
    '''
    A word and the number of times it was encountered.
    '''
    __slots__ = ('value', 'count')

    def __init__(self, value, count=1):
        self.value = value
        self.count = count

    def increment(self):
        self.count += 1

    def __eq__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return (self.value, self.count) == (other.value, other.count)

    def __repr__(self):
        return '{}({!r}, {})'.format(type(self).__name__,
                                     self.value, self.count)


class Node:
    __slots__ = ('value', 'next')

    def __init__(self, value, next=None):
        self.value = value
        self.next = next


class WordCounter(ABC):
    '''
    Counts occurrences of words, fed one at a time.
    '''

    def __init__(self):
        self.comparisons = 0
        self.reference_changes = 0

    @abstractmethod
    def encounter(self, word):
        '''
        Count one occurrence of ``word``.
        '''

    @abstractmethod
    def __iter__(self):
        '''
        Yield Words in the counter's current order.
        '''

    def encounter_all(self, words):
        for word in words:
            self.encounter(word)

    @property
    def word_count(self):
        '''
        Total number of words encountered.
        '''
        return sum(word.count for word in self)

    @property
    def distinct_word_count(self):
        return sum(1 for _ in self)

    def most_common(self, n=None):
        '''
        Return the n most frequent Words, ties broken alphabetically.
        '''
        ranked = sorted(self, key=lambda word: (-word.count, word.value))
        return ranked if n is None else ranked[:n]


class LinkedWordCounter(WordCounter):
    '''
    Word counter backed by a singly linked list starting at ``head``.
    '''

    def __init__(self):
        super().__init__()
        self.head = None

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def _push_front(self, word):
        self.head = Node(Word(word), self.head)
        self.reference_changes += 2


class UnsortedWordCounter(LinkedWordCounter):
    '''
    New words are appended; the list keeps the order of first encounter.
    '''

    def __init__(self):
        super().__init__()
        self.tail = None

    def encounter(self, word):
        node = self.head
        while node is not None:
            self.comparisons += 1
            if node.value.value == word:
                node.value.increment()
                return
            node = node.next

        added = Node(Word(word))
        if self.tail is None:
            self.head = added
        else:
            self.tail.next = added
        self.tail = added
        self.reference_changes += 2


class SortedWordCounter(LinkedWordCounter):
    '''
    The list is kept in alphabetical order.

    Finding a word and finding where to insert it are the same walk, so the
    list is only searched once per word.
    '''

    def encounter(self, word):
        previous = None
        node = self.head
        while node is not None:
            # One three-way comparison per node
            self.comparisons += 1
            if node.value.value == word:
                node.value.increment()
                return
            elif word < node.value.value:
                break
            previous, node = node, node.next

        added = Node(Word(word), node)
        if previous is None:
            self.head = added
        else:
            previous.next = added
        self.reference_changes += 2


class FrontSelfAdjustingWordCounter(LinkedWordCounter):
    '''
    Words move to the front of the list each time they are encountered.
    New words are added at the front.
    '''

    def encounter(self, word):
        if self.head is None:
            self.head = Node(Word(word))
            self.reference_changes += 1
            return

        self.comparisons += 1
        if self.head.value.value == word:
            self.head.value.increment()
            return

        parent = self.head
        while parent.next is not None:
            target = parent.next
            self.comparisons += 1
            if target.value.value == word:
                target.value.increment()
                # Unlink, then relink at the front
                parent.next = target.next
                target.next = self.head
                self.head = target
                self.reference_changes += 3
                return
            parent = target

        self._push_front(word)


class BubbleSelfAdjustingWordCounter(LinkedWordCounter):
    '''
    More frequently encountered words bubble up the list one node at a time.
    New words are added at the front.
    '''

    def encounter(self, word):
        if self.head is None:
            self.head = Node(Word(word))
            self.reference_changes += 1
            return

        self.comparisons += 1
        if self.head.value.value == word:
            self.head.value.increment()
            return

        grandparent = None
        parent = self.head
        while parent.next is not None:
            target = parent.next
            self.comparisons += 1
            if target.value.value == word:
                target.value.increment()
                # Swap target with its parent
                parent.next = target.next
                if grandparent is None:
                    self.head = target
                else:
                    grandparent.next = target
                target.next = parent
                self.reference_changes += 3
                return
            grandparent, parent = parent, target

        self._push_front(word)


COUNTERS = {
    'unsorted': UnsortedWordCounter,
    'sorted': SortedWordCounter,
    'front': FrontSelfAdjustingWordCounter,
    'bubble': BubbleSelfAdjustingWordCounter,
}
