# Prioritizes takeoff requests from a single runway.
#
#   python Takeoff_Launch.py input_file=requests.txt policy=3
#   python Takeoff_Launch.py generate.enabled=true generate.n_flights=200 input_file=random.txt

import logging
import sys
import hydra
from omegaconf import DictConfig, OmegaConf

from takeoff_scheduler import (Simulation, ScheduleSummary, TakeoffSchedulerError, generate_requests,
                               write_requests, policy_number)

log = logging.getLogger(__name__)


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    log.info("Config:\n%s", OmegaConf.to_yaml(cfg))

    try:
        # Check selector before a generated file can overwrite input_file
        policy = policy_number(cfg.policy)
        gen = cfg.generate
        if gen.enabled:
            requests = generate_requests(gen.n_flights, gen.seed, gen.start, gen.mean_gap,
                                         gen.min_pax, gen.max_pax)
            write_requests(cfg.input_file, requests, gen.seed)
            log.info("Wrote %d requests to %s", len(requests), cfg.input_file)
        events = Simulation(cfg.input_file, policy).run()
    except (TakeoffSchedulerError, OSError) as e:
        log.error("%s", e)
        sys.exit(1)

    if cfg.summary:
        log.info("Summary: %s", ScheduleSummary.from_events(events))


if __name__ == '__main__':
    main()
