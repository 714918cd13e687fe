#########################################################################################
##
##                              EVENT SCHEDULER
##                            (events/scheduler.py)
##
##         evaluates all registered locators after a trial step and selects
##                      the earliest event for the driver
##
#########################################################################################

# IMPORTS ===============================================================================

from .propagation import Propagator


# CLASS =================================================================================

class EventScheduler:
    """Ordered collection of '(locator, callback)' pairs.

    Only one event is processed per step. Among the located events the
    earliest wins, ties go to the pair that was registered first.
    Events at exactly the same time as the winner are not reported again,
    since the following step starts at the event time.
    """

    def __init__(self):
        self.entries = []


    def __len__(self):
        return len(self.entries)


    def __iter__(self):
        return iter(self.entries)


    def add(self, locator, callback):
        """Register a locator with the callback that runs at its events"""
        self.entries.append((locator, callback))


    def locate(self, state):
        """Locate the earliest event in the live step.

        Parameters
        ----------
        state : State
            state after the trial step

        Returns
        -------
        event : tuple[float, Locator, callable], None
            time, locator and callback of the earliest event
        """
        earliest = None
        for locator, callback in self.entries:
            t = locator.locate(state)
            if t is not None and (earliest is None or t < earliest[0]):
                earliest = (t, locator, callback)
        return earliest


    def unresolved(self):
        """Smallest discontinuity queue cursor of all propagators,
        'None' if there are no propagators.
        """
        cursors = [
            locator.cursor for locator, _ in self.entries
            if isinstance(locator, Propagator)
            ]
        return min(cursors) if cursors else None
